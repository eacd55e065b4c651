"""List the installed .NET runtimes and .NET Framework versions."""
