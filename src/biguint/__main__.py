from biguint.cli import main

raise SystemExit(main())
