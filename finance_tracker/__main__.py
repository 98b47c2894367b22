from finance_tracker.cli import main

raise SystemExit(main())
