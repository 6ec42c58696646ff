from .base import *  # noqa: F401, F403
from .ninja import *  # noqa: F401, F403
from .observability import *  # noqa: F401, F403
from .orders import *  # noqa: F401, F403
from .unfold import *  # noqa: F401, F403
