import os

# Widgets are created in tests without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
