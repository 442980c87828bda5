"""
The CONTROLLER layer sequences pointer events and writes results into the model.
"""
