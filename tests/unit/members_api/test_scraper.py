import unittest
from unittest.mock import patch
from faker import Faker
from bs4.builder import ParserRejectedMarkup

from services.members_api.app.services.scraper import (
    extract_members,
    iter_members,
    parse_document,
    strip_host_prefix,
)
from services.members_api.app.exceptions import MarkupParseError, CANNOT_PARSE

fake = Faker()

HOST = "https://omusp.jp"


def member_card(grade="", name="", name_en="", bio="", src=None):
    img = f'<img src="{src}">' if src is not None else ""
    return (
        '<div class="user-card">'
        f"{img}"
        f'<p class="user-pos">{grade}</p>'
        f'<p class="user-name-ja">{name}</p>'
        f'<p class="user-name-eng">{name_en}</p>'
        f'<p class="user-email">{bio}</p>'
        "</div>"
    )


def page(*cards):
    return "<html><body><main>" + "".join(cards) + "</main></body></html>"


class TestExtractMembers(unittest.TestCase):
    def test_example_card(self):
        """
        A complete card maps onto every field, with the host stripped from the image.
        """
        document = parse_document(page(member_card(
            grade="B4",
            name="山田太郎",
            name_en="Taro Yamada",
            bio="taro@example.com",
            src="https://omusp.jp/img/taro.png",
        )))

        result = extract_members(document, HOST)

        self.assertEqual(len(result), 1)
        self.assertEqual(result[0].model_dump(), {
            "grade": "B4",
            "name": "山田太郎",
            "name_en": "Taro Yamada",
            "bio": "taro@example.com",
            "img_path": "/img/taro.png",
        })

    def test_preserves_document_order(self):
        names = [fake.unique.name() for _ in range(7)]
        document = parse_document(page(*(member_card(name_en=n, bio=fake.email()) for n in names)))

        result = extract_members(document, HOST)

        self.assertEqual(len(result), len(names))
        self.assertEqual([m.name_en for m in result], names)

    def test_missing_fields_are_empty_strings(self):
        document = parse_document(page(
            '<div class="user-card"><p class="user-name-eng">Hanako Sato</p></div>'
        ))

        member = extract_members(document, HOST)[0]

        self.assertEqual(member.name_en, "Hanako Sato")
        self.assertEqual(member.grade, "")
        self.assertEqual(member.name, "")
        self.assertEqual(member.bio, "")
        self.assertEqual(member.img_path, "")
        self.assertEqual(set(member.model_dump()), {"grade", "name", "name_en", "bio", "img_path"})

    def test_img_without_src(self):
        document = parse_document(page('<div class="user-card"><img alt="no picture"></div>'))

        self.assertEqual(extract_members(document, HOST)[0].img_path, "")

    def test_uses_first_image_only(self):
        document = parse_document(page(
            '<div class="user-card"><img src="https://omusp.jp/a.png"><img src="/b.png"></div>'
        ))

        self.assertEqual(extract_members(document, HOST)[0].img_path, "/a.png")

    def test_text_is_taken_verbatim(self):
        document = parse_document(page(
            '<div class="user-card"><span class="user-pos"> M<b>1</b> </span></div>'
        ))

        self.assertEqual(extract_members(document, HOST)[0].grade, " M1 ")

    def test_multiple_matches_are_concatenated(self):
        document = parse_document(page(
            '<div class="user-card">'
            '<span class="user-email">a@example.com</span><span class="user-email">, b@example.com</span>'
            "</div>"
        ))

        self.assertEqual(extract_members(document, HOST)[0].bio, "a@example.com, b@example.com")

    def test_no_cards(self):
        document = parse_document(page('<div class="member">nobody</div>'))

        self.assertEqual(extract_members(document, HOST), [])

    def test_iter_members_is_lazy(self):
        document = parse_document(page(member_card(name="一"), member_card(name="二")))

        members = iter_members(document, HOST)

        self.assertEqual(next(members).name, "一")
        self.assertEqual(next(members).name, "二")
        with self.assertRaises(StopIteration):
            next(members)


class TestStripHostPrefix(unittest.TestCase):
    def test_strips_prefix_once(self):
        self.assertEqual(
            strip_host_prefix("https://omusp.jphttps://omusp.jp/x.png", HOST),
            "https://omusp.jp/x.png",
        )

    def test_leaves_other_values_unchanged(self):
        for src in ("/img/taro.png", "https://cdn.example.com/https://omusp.jp/x.png", ""):
            self.assertEqual(strip_host_prefix(src, HOST), src)


class TestParseDocument(unittest.TestCase):
    def test_rejected_markup_raises_parse_error(self):
        with patch(
            "services.members_api.app.services.scraper.BeautifulSoup",
            side_effect=ParserRejectedMarkup("unparseable"),
        ):
            with self.assertRaises(MarkupParseError) as ctx:
                parse_document("<<<")

        self.assertEqual(str(ctx.exception), CANNOT_PARSE)
        self.assertIsInstance(ctx.exception.__cause__, ParserRejectedMarkup)


if __name__ == '__main__':
    unittest.main()
