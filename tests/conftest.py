import os

# Module-level settings are loaded on import; make sure the defaults apply.
os.environ.pop("TIE_CONFIG_PATH", None)
