"""
The MODEL layer contains pure data structures and business logic.
It has NO knowledge of the GUI (Qt) or of the drawing surface.
It deals with Arithmetic, Coordinates, Formatting and Session state.
"""
