from dotnet_versions.cli.cli import main

if __name__ == "__main__":
    main()
