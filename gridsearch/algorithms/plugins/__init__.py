"""Algorithm plugins. Every public module defines ALGORITHM and run()."""
