# UI Element IDs
# Centralized location for all UI element IDs to ensure consistency and prevent typos.

WIZARD_FRAME = "wizard_frame"
WIZARD_HINT = "wizard_hint"
WIZARD_WORKER = "wizard"
