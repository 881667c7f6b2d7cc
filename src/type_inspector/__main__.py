import sys

from type_inspector.modules.verification.presentation.cli import main

sys.exit(main())
