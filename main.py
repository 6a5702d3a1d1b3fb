from system_navigator.cli_navigator import main

if __name__ == "__main__":
    raise SystemExit(main())
