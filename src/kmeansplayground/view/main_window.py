"""
Main Application Window
=======================
The primary GUI container: canvas on the right, controls on the left.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Frame loop: It owns the QTimer that advances the simulation and repaints
   the canvas once per frame.
3. Routing: It connects buttons and keyboard shortcuts to the SimulationState.
"""
import logging

from PySide6.QtWidgets import QMainWindow, QWidget, QHBoxLayout, QSplitter
from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QAction, QKeySequence

from kmeansplayground.model.state import SimulationState, Phase
from kmeansplayground.view.themes import Theme, DARK, other_theme
from kmeansplayground.view.widgets.canvas import KMeansCanvas
from kmeansplayground.view.widgets.control_panel import ControlPanel

logger = logging.getLogger(__name__)

VISIBLE_APP_NAME = "K-Means Playground"


class MainWindow(QMainWindow):
    def __init__(self, state: SimulationState, theme: Theme = DARK) -> None:
        super().__init__()
        self.state: SimulationState = state
        self.theme: Theme = theme

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1200, 800)

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        self.setCentralWidget(main_widget)

        main_layout = QHBoxLayout(main_widget)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        splitter = QSplitter(Qt.Horizontal)
        main_layout.addWidget(splitter)

        # --- LEFT SIDE: Controls ---
        self.controls = ControlPanel()
        splitter.addWidget(self.controls)

        # --- RIGHT SIDE: Canvas ---
        self.canvas = KMeansCanvas(self.state, self.theme)
        splitter.addWidget(self.canvas)

        # Set initial proportions (1 part sidebar : 5 parts canvas)
        splitter.setSizes([220, 980])
        splitter.setStretchFactor(1, 1)

        # --- SIGNAL CONNECTIONS ---
        self.controls.reset_requested.connect(self.on_reset)
        self.controls.restart_requested.connect(self.on_restart)
        self.controls.step_requested.connect(self.on_step)
        self.controls.auto_toggled.connect(self.on_auto_toggled)
        self.controls.k_increment_requested.connect(self.on_k_increment)
        self.controls.k_decrement_requested.connect(self.on_k_decrement)
        self.controls.theme_toggle_requested.connect(self.on_theme_toggle)
        self.canvas.point_added.connect(lambda *_: self.refresh())

        # --- ACTIONS & MENUS ---
        self._create_actions()
        self._create_menus()

        # --- FRAME LOOP ---
        if self.state.phase is Phase.UNINITIALIZED:
            self.state.initialize()

        self.frame_timer = QTimer(self)
        self.frame_timer.setInterval(self.state.config.frame_interval_ms)
        self.frame_timer.timeout.connect(self.on_frame)
        self.frame_timer.start()

        self.refresh()

    def _create_actions(self) -> None:
        self.act_step = QAction("Step", self)
        self.act_step.setShortcut(QKeySequence("Space"))
        self.act_step.triggered.connect(self.on_step)

        self.act_auto = QAction("Auto", self)
        self.act_auto.setShortcut(QKeySequence("A"))
        self.act_auto.triggered.connect(lambda: self.on_auto_toggled(not self.state.auto_mode))

        self.act_restart = QAction("Restart", self)
        self.act_restart.setShortcut(QKeySequence("R"))
        self.act_restart.triggered.connect(self.on_restart)

        self.act_reset = QAction("Reset", self)
        self.act_reset.setShortcuts([QKeySequence("Backspace"), QKeySequence("Del")])
        self.act_reset.triggered.connect(self.on_reset)

        self.act_k_inc = QAction("More Clusters", self)
        self.act_k_inc.setShortcuts([QKeySequence("+"), QKeySequence("=")])
        self.act_k_inc.triggered.connect(self.on_k_increment)

        self.act_k_dec = QAction("Fewer Clusters", self)
        self.act_k_dec.setShortcut(QKeySequence("-"))
        self.act_k_dec.triggered.connect(self.on_k_decrement)

        self.act_theme = QAction("Toggle Theme", self)
        self.act_theme.setShortcut(QKeySequence("T"))
        self.act_theme.triggered.connect(self.on_theme_toggle)

        self.act_exit = QAction("Quit", self)
        self.act_exit.setShortcuts(QKeySequence.StandardKey.Quit)
        self.act_exit.triggered.connect(self.close)

    def _create_menus(self) -> None:
        menu_bar = self.menuBar()

        sim_menu = menu_bar.addMenu("&Simulation")
        sim_menu.addAction(self.act_step)
        sim_menu.addAction(self.act_auto)
        sim_menu.addSeparator()
        sim_menu.addAction(self.act_k_inc)
        sim_menu.addAction(self.act_k_dec)
        sim_menu.addSeparator()
        sim_menu.addAction(self.act_restart)
        sim_menu.addAction(self.act_reset)
        sim_menu.addSeparator()
        sim_menu.addAction(self.act_exit)

        view_menu = menu_bar.addMenu("&View")
        view_menu.addAction(self.act_theme)

    # --- HELPER METHODS ---

    def refresh(self) -> None:
        """Sync the controls with the state and schedule a repaint."""
        self.controls.update_from_state(self.state)
        self.canvas.update()

    # --- SLOTS ---

    def on_frame(self) -> None:
        self.state.advance_frame()
        self.refresh()

    def on_step(self) -> None:
        # A manual step always leaves auto mode
        self.state.set_auto(False)
        if self.state.step():
            logger.debug(f"Manual step (points={self.state.point_count}, k={self.state.k}).")
        self.refresh()

    def on_auto_toggled(self, enabled: bool) -> None:
        self.state.set_auto(enabled)
        self.statusBar().showMessage("Auto mode on" if enabled else "Auto mode off", 2000)
        self.refresh()

    def on_restart(self) -> None:
        self.state.restart()
        self.statusBar().showMessage("Centroids re-initialized", 2000)
        self.refresh()

    def on_reset(self) -> None:
        self.state.reset()
        self.statusBar().showMessage("Canvas cleared", 2000)
        self.refresh()

    def on_k_increment(self) -> None:
        if self.state.increment_k():
            logger.debug(f"k increased to {self.state.k}.")
        self.refresh()

    def on_k_decrement(self) -> None:
        if self.state.decrement_k():
            logger.debug(f"k decreased to {self.state.k}.")
        self.refresh()

    def on_theme_toggle(self) -> None:
        self.theme = other_theme(self.theme)
        self.canvas.set_theme(self.theme)
        logger.debug(f"Theme switched to {self.theme.name}.")

    def closeEvent(self, event) -> None:
        self.frame_timer.stop()
        super().closeEvent(event)
