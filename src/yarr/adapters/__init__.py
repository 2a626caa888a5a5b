"""Default collaborators used by the ``yarr`` command.

- storage: SQLite database opener
- platform: browser launcher and blocking HTTP listener
"""
