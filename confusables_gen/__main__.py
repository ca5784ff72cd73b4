from confusables_gen.cli import main

raise SystemExit(main())
