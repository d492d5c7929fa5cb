"""Centralized timeout configuration for probe operations.

All probe-related timeout values are defined here to:
1. Provide a single source of truth for tuning
2. Document the purpose of each timeout value
3. Enable easy adjustment for different environments (e.g., slower systems)
"""


class ProbeTimeouts:
    """Centralized timeout configuration for probing candidate editors.

    All values are in seconds.
    """

    VERSION_QUERY: float = 2.0
    """Default time allowed for `<command> --version` to exit.

    Electron-based editors answer --version from a small launcher script
    without starting the GUI, so two seconds is generous on a healthy
    system. Overridden by [discovery] probe_timeout in config.toml.
    """

    KILL_WAIT: float = 1.0
    """Time to wait for a killed probe (and its children) to be reaped.

    SIGKILL cannot be ignored, so this only bounds the time the OS needs
    to tear the process down. It keeps a timed-out probe from blocking the
    caller for longer than the probe timeout plus this value.
    """
