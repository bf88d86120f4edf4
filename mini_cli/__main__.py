from mini_cli.cli import main

raise SystemExit(main())
