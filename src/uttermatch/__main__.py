from uttermatch.apps.cli import main

raise SystemExit(main())
