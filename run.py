"""
Entry Point Script (Bootstrap)
==============================
This script is the absolute starting point of the application for development.

Why is this file needed?
------------------------
1. It is located outside the 'src' package to act as a convenient runner.
2. It modifies 'sys.path' so that 'from complexplane.model...' resolves
   without installing the package.

Usage:
    $ python run.py            # add --debug for DEBUG logs in complexplane_debug.log
"""
import sys
import os

# Add the 'src' directory to the Python path
current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

appid = 'ComplexPlane.Rotation'  # Arbitrary string
try:
    import ctypes
    # Own taskbar group on Windows instead of the python.exe one
    ctypes.windll.shell32.SetCurrentProcessExplicitAppUserModelID(appid)
except (AttributeError, ImportError):
    # Not on Windows or ctypes not available
    pass

from complexplane.main import main

if __name__ == "__main__":
    main()
