""" Async client for the guild bot REST API. Resources are reached
by chaining attributes and calls on an `Api`:

```py
async with aiohttp.ClientSession() as session:
    api = qgapi.Api.for_bot(session, app_id, token)
    members = await api.guild(guild_id).members
```
"""

__version__ = "0.1.0"

from .api import *
from .models import *
from .rest import *
