from keystat.cli.main import main

raise SystemExit(main())
