"""
yarr CLI package.

``yarr.cli.main`` is the console entry point and the only place where a
startup failure becomes a process exit status.
"""
