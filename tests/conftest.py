# tests/conftest.py

import os

# Headless rendering for the matplotlib and Qt tests.
os.environ.setdefault("MPLBACKEND", "Agg")
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
