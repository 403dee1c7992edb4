"""Backend setup account interface with document store and relation configuration."""

from campus_types.schools import SetupAccountInterface as SetupAccountInterfaceBase
from campus_backend.interfaces.base import BackendEntityInterface, Relation


class SetupAccountInterface(SetupAccountInterfaceBase, BackendEntityInterface):
    collection = "setup_accounts"
    cache_key = "setup_accounts"
    cache_ttl = 900
    relations = (
        Relation("school", "School"),
    )
