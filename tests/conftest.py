import os

# Widgets are exercised without a display.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
