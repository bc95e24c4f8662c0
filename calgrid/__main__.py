from calgrid.cli import main

raise SystemExit(main())
