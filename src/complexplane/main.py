"""
Application Initialization
==========================
This module constructs the MVC (Model-View-Controller) architecture and starts
the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the Data Model (SessionState, FormState).
2. Instantiates the Main Window (View), which owns the controller.
3. Passes the Model into the View so they can communicate.
"""
import sys

from PySide6.QtWidgets import QApplication

from complexplane.config import DEBUG_FLAG, VISIBLE_APP_NAME
from complexplane.logging_config import setup_logging_from_argv
from complexplane.model.state import FormState, SessionState
from complexplane.view.main_window import MainWindow


def main() -> None:
    # 1. Setup Logging (Console + Optional File)
    # `--debug` logs every drawn vector, also into complexplane_debug.log
    setup_logging_from_argv(sys.argv)

    # 2. Create the Qt Application
    app = QApplication([arg for arg in sys.argv if arg != DEBUG_FLAG])
    app.setApplicationName(VISIBLE_APP_NAME)

    # 3. Initialize the Data Model
    session = SessionState()
    form = FormState()

    # 4. Initialize the Main Window, passing the model
    window = MainWindow(session, form)
    window.show()

    # 5. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
