"""Allow ``python -m wordflow``."""

from wordflow.cli import main

raise SystemExit(main())
