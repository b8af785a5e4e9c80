import unittest

from gdriveconnect.models import (
    AdditionalRole,
    PermissionRole,
    PermissionType,
    UploadParameters,
    UserPermission,
    UserPermissionsList,
)


class TestUserPermission(unittest.TestCase):
    def test_from_api(self) -> None:
        perm = UserPermission.from_api(
            {
                "id": "p1",
                "role": "reader",
                "type": "user",
                "value": "a@example.com",
                "additionalRoles": ["commenter", "unknown"],
                "withLink": True,
            }
        )
        self.assertEqual(perm.id, "p1")
        self.assertIs(perm.role, PermissionRole.READER)
        self.assertIs(perm.type, PermissionType.USER)
        self.assertEqual(perm.additional_roles, {AdditionalRole.COMMENTER})
        self.assertTrue(perm.with_link)

    def test_unknown_role_is_none(self) -> None:
        self.assertIsNone(UserPermission.from_api({"role": "organizer"}).role)

    def test_to_api_body(self) -> None:
        perm = UserPermission(
            role=PermissionRole.WRITER,
            type=PermissionType.DOMAIN,
            value="example.com",
        )
        self.assertEqual(
            perm.to_api_body(),
            {"role": "writer", "type": "domain", "value": "example.com"},
        )

    def test_to_update_body_only_roles(self) -> None:
        perm = UserPermission(
            role=PermissionRole.READER,
            type=PermissionType.USER,
            value="a@example.com",
            additional_roles={AdditionalRole.COMMENTER},
        )
        self.assertEqual(
            perm.to_update_body(),
            {"role": "reader", "additionalRoles": ["commenter"]},
        )


class TestUserPermissionsList(unittest.TestCase):
    def test_keyed_by_id(self) -> None:
        perms = UserPermissionsList.from_api(
            {
                "etag": "e1",
                "items": [
                    {"id": "p1", "role": "owner", "type": "user"},
                    {"id": "p2", "role": "reader", "type": "anyone"},
                    {"role": "reader"},
                ],
            }
        )
        self.assertEqual(len(perms), 2)
        self.assertIn("p2", perms)
        self.assertIs(perms.get("p1").role, PermissionRole.OWNER)
        self.assertIsNone(perms.get("missing"))
        self.assertEqual(perms.etag, "e1")
        self.assertEqual({p.id for p in perms}, {"p1", "p2"})


class TestUploadParameters(unittest.TestCase):
    def test_to_query_only_set_options(self) -> None:
        self.assertEqual(UploadParameters().to_query(), {})
        params = UploadParameters(convert=True, ocr=False, ocr_language="en")
        self.assertEqual(
            params.to_query(),
            {"convert": True, "ocr": False, "ocrLanguage": "en"},
        )


if __name__ == "__main__":
    unittest.main()
