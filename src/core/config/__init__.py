"""
Configuration subsystem for Stepline.

Static configuration only: values are read from the environment (with .env
support) once at startup and validated on import.

Usage
-----
```python
from src.core.config import Config

token = Config.DISCORD_TOKEN
if Config.is_production():
    logger.info("Running in production mode")
```
"""

from src.core.config.config import Config, Environment

__all__ = [
    "Config",
    "Environment",
]
