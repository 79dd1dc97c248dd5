from __future__ import annotations

import sys

from htmltoc.cli import main

sys.exit(main())
