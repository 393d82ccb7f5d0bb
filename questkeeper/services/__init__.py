from questkeeper.services.credentials import CredentialStore
from questkeeper.services.progress import ProgressStore
from questkeeper.services.seeding import seed_content
from questkeeper.services.sessions import SessionManager

__all__ = ["CredentialStore", "ProgressStore", "SessionManager", "seed_content"]
