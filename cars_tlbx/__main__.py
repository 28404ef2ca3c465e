from cars_tlbx.cli import main


raise SystemExit(main())
