"""BcryptHasher — salted one-way hashing off the event loop.

Tests cover:
    - Hash never equals the plaintext and verifies against it
    - Same password hashes differently each time (salted)
    - Configured work factor is encoded in the hash
    - Invalid stored hash verifies as False instead of raising
"""

from dashboard.infrastructure.password_hashing import BcryptHasher


async def test_hash_differs_from_plaintext_and_verifies():
    hasher = BcryptHasher(rounds=4)
    hashed = await hasher.hash("analytical")

    assert hashed != "analytical"
    assert "analytical" not in hashed
    assert await hasher.verify("analytical", hashed) is True
    assert await hasher.verify("analytica1", hashed) is False


async def test_hash_is_salted():
    hasher = BcryptHasher(rounds=4)
    assert await hasher.hash("same") != await hasher.hash("same")


async def test_default_work_factor_is_ten():
    hashed = await BcryptHasher().hash("analytical")
    assert hashed.startswith("$2b$10$")


async def test_long_passwords_are_accepted():
    hasher = BcryptHasher(rounds=4)
    password = "p" * 100
    hashed = await hasher.hash(password)
    assert await hasher.verify(password, hashed) is True


async def test_verify_rejects_malformed_hash():
    assert await BcryptHasher(rounds=4).verify("pw", "not-a-bcrypt-hash") is False
