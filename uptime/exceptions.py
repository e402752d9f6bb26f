"""Uptime checker exception types.

Convention:
- ``SyncToolError`` is raised when the external sync command could not be
  run at all (binary missing, timeout, OS refused to spawn it).  A command
  that ran and exited nonzero is *not* an exception; it is reported through
  ``CopyResult``.
- Local file problems never raise out of ``uptime_log_service``; they come
  back as a failed ``FileOpResult``.
"""

from __future__ import annotations


class SyncToolError(Exception):
    """Raised when the sync command cannot be launched or does not finish.

    ``UptimeChecker`` catches this, logs it and prints the retrieval or
    upload error line, then carries on with the run.
    """
