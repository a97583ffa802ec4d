import pytest

from domain.value_objects import ItemType
from exceptions import NotFoundError, ValidationError
from repositories.item_repository import ItemRepository
from repositories.vote_repository import VoteRepository
from services.item_info_service import ItemInfoService, parse_item_type


def test_list_posts_newest_first_with_voter_state(seeded):
    items = ItemInfoService(seeded).list_items(item_type="post", voter="u-1")

    assert [i["id"] for i in items] == ["p-2", "p-1"]
    by_id = {i["id"]: i for i in items}
    assert by_id["p-1"]["voted"] == "positive"
    assert by_id["p-1"]["voteValue"] == 1
    assert by_id["p-2"]["voted"] == "negative"
    assert by_id["p-2"]["voteValue"] == 0


def test_list_without_voter_reports_no_votes(seeded):
    items = ItemInfoService(seeded).list_items(item_type="post")

    assert all(i["voted"] is None for i in items)
    assert all(i["voteValue"] == 0 for i in items)


def test_votes_are_per_voter(seeded):
    items = ItemInfoService(seeded).list_items(item_type="post", voter="u-9", item_ids=["p-1"])

    assert items[0]["voted"] == "negative"


def test_list_by_ids_keeps_requested_order_and_skips_unknown(seeded):
    items = ItemInfoService(seeded).list_items(item_type="post", item_ids=["p-1", "nope", "p-2"])

    assert [i["id"] for i in items] == ["p-1", "p-2"]


def test_list_classes(seeded):
    items = ItemInfoService(seeded).list_items(item_type="class", voter="u-1")

    assert items == [{
        "id": "c-1",
        "title": "Operating Systems",
        "courseCode": "CISC 324",
        "rating": 4.5,
        "author": "u-4",
        "summary": "Processes and memory",
        "type": "class",
        "tags": ["core"],
        "voted": None,
    }]


def test_unknown_type_is_rejected_at_the_service(seeded):
    with pytest.raises(ValidationError):
        ItemInfoService(seeded).list_items(item_type="bogus")

    with pytest.raises(ValidationError) as exc:
        parse_item_type("quiz")
    assert exc.value.details == {"invalid_fields": {"item_type": "quiz"}}


def test_get_item(seeded):
    item = ItemInfoService(seeded).get_item(item_type="link", item_id="l-1", voter="u-1")

    assert item["url"] == "https://example.edu/notes"
    assert item["author"] == "u-2"
    assert item["voted"] == "positive"


def test_get_missing_item(seeded):
    with pytest.raises(NotFoundError) as exc:
        ItemInfoService(seeded).get_item(item_type="post", item_id="p-404")

    assert exc.value.message == "Post 'p-404' not found"


def test_list_comments_oldest_first(seeded):
    items = ItemInfoService(seeded).list_comments(post_id="p-1", voter="u-1")

    assert [i["id"] for i in items] == ["cm-1", "cm-2"]
    assert items[1]["parentComment"] == "cm-1"
    assert items[1]["parent"] == "p-1"
    assert items[0]["voted"] is None
    assert items[1]["voted"] == "negative"
    assert "voteValue" not in items[1]


def test_list_comments_of_missing_post(seeded):
    with pytest.raises(NotFoundError):
        ItemInfoService(seeded).list_comments(post_id="p-404")


def test_list_ratings_newest_first(seeded):
    items = ItemInfoService(seeded).list_ratings(class_id="c-1")

    assert [i["id"] for i in items] == ["r-2", "r-1"]
    assert all(i["parent"] == "c-1" for i in items)
    assert items[0]["rating"] == 4


def test_project_rows_appends_to_existing_accumulator(seeded):
    service = ItemInfoService(seeded)
    items = service.list_items(item_type="link")

    rows = ItemRepository(seeded, ItemType.RATING).get_ratings_for_class("c-1")
    result = service.project_rows(rows, ItemType.RATING, items=items)

    assert result is items
    assert [i["type"] for i in items] == ["link", "rating", "rating"]


def test_vote_repository(seeded):
    votes = VoteRepository(seeded)

    assert votes.get_vote("u-1", ItemType.POST, "p-1").vote_value == 1
    assert votes.get_vote("u-1", ItemType.CLASS, "c-1") is None
    assert set(votes.get_votes_by_item("u-1", ItemType.POST, ["p-1", "p-2"])) == {"p-1", "p-2"}
    assert votes.get_votes_by_item("u-1", ItemType.POST, []) == {}


def test_item_repository_lookups(seeded):
    assert len(ItemRepository(seeded, ItemType.COMMENT).get_comments_for_post("p-1")) == 2
    assert ItemRepository(seeded, ItemType.POST).exists("p-1")
    assert not ItemRepository(seeded, ItemType.POST).exists("p-404")
    assert ItemRepository(seeded, ItemType.POST).get_by_ids([]) == []


def test_get_item_reads_only_the_voters_vote_on_that_item(seeded):
    service = ItemInfoService(seeded)

    assert service.get_item(item_type="post", item_id="p-1", voter="u-1")["voted"] == "positive"
    assert service.get_item(item_type="post", item_id="p-1", voter="u-9")["voted"] == "negative"

    unvoted = service.get_item(item_type="post", item_id="p-1", voter="u-404")
    assert unvoted["voted"] is None
    assert unvoted["voteValue"] == 0

    anonymous = service.get_item(item_type="comment", item_id="cm-2")
    assert anonymous["voted"] is None
    assert "voteValue" not in anonymous
