"""
The MODEL layer contains pure data structures and geometry logic.
It has NO knowledge of the GUI (Qt) or of the drawing session.
It deals with points, wall segments, snapping, topology edits and history.
"""
