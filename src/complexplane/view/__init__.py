"""
The VIEW layer: immediate-mode drawing of the complex plane and the Qt widgets.
"""
