import unittest

from auth.security import hash_password, password_too_long, verify_password


class TestPasswordHashing(unittest.TestCase):
    def test_hash_verifies(self):
        hashed = hash_password("s3cret-pass")
        self.assertNotEqual(hashed, "s3cret-pass")
        self.assertTrue(verify_password("s3cret-pass", hashed))

    def test_wrong_password_does_not_verify(self):
        hashed = hash_password("s3cret-pass")
        self.assertFalse(verify_password("s3cret-pasS", hashed))

    def test_hash_is_salted(self):
        self.assertNotEqual(hash_password("same"), hash_password("same"))

    def test_work_factor_is_encoded_in_hash(self):
        self.assertTrue(hash_password("pw", rounds=4).startswith("$2b$04$"))

    def test_malformed_hash_is_a_negative_result(self):
        self.assertFalse(verify_password("pw", "not-a-bcrypt-hash"))
        self.assertFalse(verify_password("pw", ""))

    def test_password_length_limit(self):
        self.assertFalse(password_too_long("a" * 72))
        self.assertTrue(password_too_long("a" * 73))
        # Multi-byte characters count by encoded length
        self.assertTrue(password_too_long("é" * 37))


if __name__ == "__main__":
    unittest.main()
