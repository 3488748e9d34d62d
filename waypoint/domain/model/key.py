"""PGP key entity."""

from waypoint.domain.model.common import DomainModel


class PgpKey(DomainModel):
    """A published PGP public key.

    ``pubkey_url`` is the site path of the armored key file, such as
    ``/keys/main.asc``.
    """

    id: str
    name: str
    desc: str = ""
    fingerprint: str = ""
    pubkey_url: str
