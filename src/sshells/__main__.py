from sshells.cli import main

raise SystemExit(main())
