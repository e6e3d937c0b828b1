from .config import KickConfig
from .executor import GitExecutor, GitGateway
from .kicker import GitKicker, SquashResult
from .message import derive_commit_message, fallback_branch_name
