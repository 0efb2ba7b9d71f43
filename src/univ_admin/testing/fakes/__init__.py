"""Testing fakes – deterministic doubles for ports."""
from univ_admin.testing.fakes.clock import FAKE_NOW, FakeClock
from univ_admin.testing.fakes.hashing import FakePasswordHasher

__all__ = ["FAKE_NOW", "FakeClock", "FakePasswordHasher"]
