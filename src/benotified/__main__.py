from benotified.cli import main

raise SystemExit(main())
