import unittest

import gdriveconnect


class TestPublicApi(unittest.TestCase):
    def test_top_level_exports_exist(self) -> None:
        self.assertTrue(hasattr(gdriveconnect, "DriveTemplate"))
        self.assertTrue(hasattr(gdriveconnect, "DriveOperations"))
        self.assertTrue(hasattr(gdriveconnect, "ElementBuilder"))
        self.assertTrue(hasattr(gdriveconnect, "AuthInfo"))
        self.assertTrue(hasattr(gdriveconnect, "OAuthClient"))

        self.assertTrue(hasattr(gdriveconnect, "DriveFile"))
        self.assertTrue(hasattr(gdriveconnect, "DriveFilesPage"))
        self.assertTrue(hasattr(gdriveconnect, "UserPermission"))

        self.assertTrue(hasattr(gdriveconnect, "GDriveConnectError"))
        self.assertTrue(hasattr(gdriveconnect, "NotFoundError"))

    def test___all___is_defined(self) -> None:
        self.assertIn("DriveTemplate", gdriveconnect.__all__)
        self.assertIn("ElementBuilder", gdriveconnect.__all__)
        self.assertIn("GDriveConnectError", gdriveconnect.__all__)
        for name in gdriveconnect.__all__:
            self.assertTrue(hasattr(gdriveconnect, name), name)


if __name__ == "__main__":
    unittest.main()
