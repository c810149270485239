"""
FiveStar Support SDK v1.1.0
Customer ID generator (Python)
MIT License
"""

from typing import Optional

from fivestar_support.customer_id import base32, entropy
from fivestar_support.customer_id.keys import derive_key
from fivestar_support.customer_id.payload import ENTROPY_SIZE, Payload, mask


class CustomerIdGenerator:
    """Mints customer ids bound to a client id.

    The random source and clock are injectable so tests can pin the output
    shape. Production code should keep the libsodium default.
    """

    def __init__(self, random_source: Optional[entropy.RandomSource] = None,
                 clock: Optional[entropy.Clock] = None):
        self.random_source = random_source or entropy.default_random_source
        self.clock = clock or entropy.system_clock

    def new_payload(self) -> Payload:
        return Payload.build(
            entropy.timestamp_ms(self.clock),
            entropy.draw(self.random_source, ENTROPY_SIZE),
        )

    def generate(self, client_id: str) -> str:
        """Return a new 26 character customer id for `client_id`.

        Raises EntropyUnavailableError if the random source fails.
        """
        payload = self.new_payload()
        return base32.encode(mask(payload.pack(), derive_key(client_id)))


_default_generator = CustomerIdGenerator()


def generate_customer_id(client_id: str) -> str:
    return _default_generator.generate(client_id)
