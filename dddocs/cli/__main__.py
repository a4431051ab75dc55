from dddocs.cli import main

raise SystemExit(main())
