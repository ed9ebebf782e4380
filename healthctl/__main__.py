from healthctl.cli import main

raise SystemExit(main())
