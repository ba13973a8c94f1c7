import secrets
import time


class Snowflake:
    """
    Snowflake ID generator and parser.
    """

    # Epoch is 2024/1/1 at midnight UTC; these IDs only ever encode the time
    # we created the row, never an original publish time
    EPOCH = 1704067200

    TYPE_POST = 0b000
    TYPE_IDENTITY = 0b010

    @classmethod
    def generate(cls, type_id: int) -> int:
        """
        Generates a snowflake-style ID for the given "type". They fit inside
        63 bits (a signed bigint).

        ID layout is:
        * 41 bits of millisecond-level timestamp (enough for EPOCH + 69 years)
        * 19 bits of random data (1% chance of clash at 10000 per millisecond)
        * 3 bits of type information

        A clash makes the insert fail, which the caller sees as a
        StorageError and can retry.
        """
        now: int = int((time.time() - cls.EPOCH) * 1000)
        rand_seq: int = secrets.randbits(19)
        return (now << 22) | (rand_seq << 3) | type_id

    @classmethod
    def get_type(cls, snowflake: int) -> int:
        if snowflake < (1 << 22):
            raise ValueError("Not a valid Snowflake ID")
        return snowflake & 0b111

    @classmethod
    def get_time(cls, snowflake: int) -> float:
        """
        Returns the generation time (in UNIX timestamp seconds) of the ID
        """
        if snowflake < (1 << 22):
            raise ValueError("Not a valid Snowflake ID")
        return ((snowflake >> 22) / 1000) + cls.EPOCH

    # Pre-baked methods for django model defaults
    @classmethod
    def generate_post(cls) -> int:
        return cls.generate(cls.TYPE_POST)

    @classmethod
    def generate_identity(cls) -> int:
        return cls.generate(cls.TYPE_IDENTITY)
