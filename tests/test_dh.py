from secrets import token_bytes

import pytest
from cryptography.hazmat.primitives.asymmetric.x448 import X448PrivateKey, X448PublicKey
from cryptography.hazmat.primitives.serialization import Encoding, PrivateFormat, PublicFormat, NoEncryption

from ladder448 import dh
from ladder448.elliptic import LOW_ORDER, p, tobytes
from ladder448.exceptions import InvalidKeyError, LowOrderPointError

# Test vectors from RFC 7748 section 6.2
ALICE_SK = "9a8f4925d1519f5775cf46b04b5800d4ee9ee8bae8bc5565d498c28dd9c9baf574a9419744897391006382a6f127ab1d9ac2d8c0a598726b"
ALICE_PK = "9b08f7cc31b7e3e67d22d5aea121074a273bd2b83de09c63faa73d2c22c5d9bbc836647241d953d40c5b12da88120d53177f80e532c41fa0"
BOB_SK = "1c306a7ac2a0e2e0990b294470cba339e6453772b075811d8fad0d1d6927c120bb5ee8972b0d3e21374c9c921b09d1b0366f10b65173992d"
BOB_PK = "3eb7a829b0cd20f5bcfc0b599b6feccf6da4627107bdb0d4f345b43027d8b972fc3e34fb4232a13ca706dcb57aec3dae07bdc1c67bf33609"
SHARED = "07fff4181ac6cc95ec1c16a94a0f74d12da232ce40a77552281d282bb60c0b56fd2464c335543936521c24403085d59a449a5037514a879d"


def test_rfc7748_key_exchange():
  alice_sk, bob_sk = bytes.fromhex(ALICE_SK), bytes.fromhex(BOB_SK)
  assert dh.public_key(alice_sk).hex() == ALICE_PK
  assert dh.public_key(bob_sk).hex() == BOB_PK
  assert dh.shared_secret(alice_sk, bytes.fromhex(BOB_PK)).hex() == SHARED
  assert dh.shared_secret(bob_sk, bytes.fromhex(ALICE_PK)).hex() == SHARED


def test_secret_not_modified():
  sk = bytearray(bytes.fromhex(ALICE_SK))
  dh.public_key(sk)
  dh.shared_secret(sk, bytes.fromhex(BOB_PK))
  assert sk.hex() == ALICE_SK


def test_vs_cryptography():
  for i in range(5):
    key = X448PrivateKey.generate()
    peer = X448PrivateKey.generate()
    sk = key.private_bytes(Encoding.Raw, PrivateFormat.Raw, NoEncryption())
    pk = key.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)
    peer_pk = peer.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)
    assert dh.public_key(sk) == pk
    assert dh.shared_secret(sk, peer_pk) == key.exchange(X448PublicKey.from_public_bytes(peer_pk))


def test_low_order():
  for lo in LOW_ORDER:
    assert dh.is_low_order(lo)
  # Encodings that are not reduced mod p
  assert dh.is_low_order(tobytes(p))
  assert dh.is_low_order(tobytes(p + 1))
  assert not dh.is_low_order(tobytes(5))
  assert not dh.is_low_order(bytes.fromhex(BOB_PK))

  sk = token_bytes(56)
  for pk in LOW_ORDER + (tobytes(p), tobytes(p + 1)):
    with pytest.raises(LowOrderPointError) as exc:
      dh.shared_secret(sk, pk)
    assert "low order" in str(exc.value)


def test_invalid_length():
  with pytest.raises(InvalidKeyError) as exc:
    dh.public_key(bytes(32))
  assert "Invalid secret key" in str(exc.value)

  with pytest.raises(InvalidKeyError) as exc:
    dh.shared_secret(token_bytes(56), bytes(57))
  assert "Invalid public key" in str(exc.value)

  # Also a plain ValueError, as all our errors are
  with pytest.raises(ValueError):
    dh.shared_secret(bytes(55), token_bytes(56))
