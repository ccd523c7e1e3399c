"""Platform services shared by feature packages."""
