from __future__ import annotations

import matplotlib

# Figures are only built, never shown
matplotlib.use("Agg")
