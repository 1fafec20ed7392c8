from __future__ import annotations

import os

# headless pygame for the rendering tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
