"""Testing – fakes shared by the test-suite and by downstream module tests."""
from univ_admin.testing.fakes import FAKE_NOW, FakeClock, FakePasswordHasher

__all__ = ["FAKE_NOW", "FakeClock", "FakePasswordHasher"]
