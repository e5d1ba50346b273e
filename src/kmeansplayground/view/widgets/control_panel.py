"""
Simulation Control Panel
"""
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QGroupBox, QFormLayout
)
from PySide6.QtCore import Signal, Qt

from kmeansplayground.model.state import SimulationState


class ControlPanel(QWidget):
    # Signals forwarded to the main window, which applies them to the state
    reset_requested = Signal()
    restart_requested = Signal()
    step_requested = Signal()
    auto_toggled = Signal(bool)
    k_increment_requested = Signal()
    k_decrement_requested = Signal()
    theme_toggle_requested = Signal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)

        layout = QVBoxLayout(self)

        # --- Stats Group ---
        grp_stats = QGroupBox("Status")
        form = QFormLayout(grp_stats)

        self.lbl_points = QLabel("0")
        form.addRow("Points:", self.lbl_points)

        k_row = QHBoxLayout()
        self.btn_k_dec = QPushButton("−")
        self.lbl_k = QLabel("0")
        self.lbl_k.setAlignment(Qt.AlignCenter)
        self.lbl_k.setMinimumWidth(24)
        self.btn_k_inc = QPushButton("+")
        for btn in (self.btn_k_dec, self.btn_k_inc):
            btn.setFixedWidth(32)
        k_row.addWidget(self.btn_k_dec)
        k_row.addWidget(self.lbl_k)
        k_row.addWidget(self.btn_k_inc)
        form.addRow("Clusters (k):", k_row)

        self.lbl_convergence = QLabel("")
        form.addRow("Centroids:", self.lbl_convergence)

        layout.addWidget(grp_stats)

        # --- Actions ---
        grp_actions = QGroupBox("Algorithm")
        actions = QVBoxLayout(grp_actions)

        self.btn_step = QPushButton("Step")
        self.btn_auto = QPushButton("Auto")
        self.btn_auto.setCheckable(True)
        self.btn_restart = QPushButton("Restart")
        self.btn_restart.setToolTip("Keep the points, draw new centroids")
        self.btn_reset = QPushButton("Reset")
        self.btn_reset.setToolTip("Remove all points")
        for btn in (self.btn_step, self.btn_auto, self.btn_restart, self.btn_reset):
            btn.setMinimumHeight(32)
            actions.addWidget(btn)

        layout.addWidget(grp_actions)

        self.btn_theme = QPushButton("Toggle Theme")
        layout.addWidget(self.btn_theme)

        layout.addStretch()

        # Keyboard shortcuts belong to the window, buttons must not steal Space
        for btn in self.findChildren(QPushButton):
            btn.setFocusPolicy(Qt.NoFocus)

        # --- SIGNAL CONNECTIONS ---
        self.btn_reset.clicked.connect(self.reset_requested)
        self.btn_restart.clicked.connect(self.restart_requested)
        self.btn_step.clicked.connect(self.step_requested)
        self.btn_auto.toggled.connect(self.auto_toggled)
        self.btn_k_inc.clicked.connect(self.k_increment_requested)
        self.btn_k_dec.clicked.connect(self.k_decrement_requested)
        self.btn_theme.clicked.connect(self.theme_toggle_requested)

    # --- PROPERTIES ---

    @property
    def convergence_message(self) -> str:
        return self.lbl_convergence.text()

    def _set_text(self, label: QLabel, text: str) -> None:
        if label.text() != text:
            label.setText(text)

    # --- SLOTS ---

    def update_from_state(self, state: SimulationState) -> None:
        """Mirror the read-only parts of the state into the widgets."""
        self._set_text(self.lbl_points, str(state.point_count))
        self._set_text(self.lbl_k, str(state.k))
        self._set_text(self.lbl_convergence, "Settled" if state.is_converged else "Moving")

        self.btn_k_dec.setEnabled(state.k > state.config.k_min)
        self.btn_k_inc.setEnabled(state.k < state.config.k_max)

        if self.btn_auto.isChecked() != state.auto_mode:
            # Sync without re-emitting auto_toggled
            self.btn_auto.blockSignals(True)
            self.btn_auto.setChecked(state.auto_mode)
            self.btn_auto.blockSignals(False)
