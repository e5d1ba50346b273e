"""
Application Initialization
==========================
This module wires the model and the view together and starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Creates (or reuses) the QApplication.
2. Instantiates the SimulationState from a configuration.
3. Instantiates the Main Window (View) and passes the state into it.
"""
from __future__ import annotations

import logging
import os
import sys
from typing import Optional, Sequence

import numpy as np
from PySide6.QtCore import QCoreApplication
from PySide6.QtWidgets import QApplication

from kmeansplayground.config import SimulationConfig
from kmeansplayground.model.state import SimulationState
from kmeansplayground.view.main_window import MainWindow, VISIBLE_APP_NAME
from kmeansplayground.view.themes import Theme, DARK

logger = logging.getLogger(__name__)

ORG_ID = "kmeansplayground"
APP_ID = "kmeans-playground"


def create_app(argv: Optional[Sequence[str]] = None) -> QApplication:
    """Create and configure the QApplication instance (or return the running one)."""
    app = QApplication.instance()
    if app is not None:
        return app

    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)

    app = QApplication(list(argv) if argv is not None else sys.argv)
    app.setApplicationDisplayName(VISIBLE_APP_NAME)
    return app


def build_window(config: SimulationConfig, theme: Theme = DARK, seed: Optional[int] = None) -> MainWindow:
    """Create the state and the window that owns it."""
    state = SimulationState(config=config, rng=np.random.default_rng(seed))
    return MainWindow(state, theme)


def main(config: SimulationConfig, theme: Theme = DARK, seed: Optional[int] = None) -> int:
    """Run the playground until the window is closed. Returns the exit code."""
    app = create_app()

    window = build_window(config, theme, seed)
    window.show()
    logger.info(f"{VISIBLE_APP_NAME} started (k={window.state.k}, theme={theme.name}).")

    return app.exec()
