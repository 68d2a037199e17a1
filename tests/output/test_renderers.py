"""Human and --quiet rendering of query results."""

from socialgraph.output.renderers import render_quiet, render_result
from socialgraph.services.result import ServiceResult

_REACHABLE = ServiceResult.success("distance", source=1, target=6, length=3, reachable=True)


class TestDistance:
    def test_reachable(self) -> None:
        output = render_result(_REACHABLE)
        assert output.splitlines()[0] == "OK distance"
        assert "  source: 1" in output
        assert "  target: 6" in output
        assert "  length: 3" in output
        assert "not connected" not in output

    def test_unreachable_note(self) -> None:
        output = render_result(
            ServiceResult.success("distance", source=1, target=7, length=-1, reachable=False)
        )
        assert "length: -1" in output
        assert "not connected by any chain of friendships" in output

    def test_member_names_are_not_markup(self) -> None:
        output = render_result(
            ServiceResult.success(
                "distance", source="[bold]x", target="y", length=1, reachable=True
            )
        )
        assert "source: [bold]x" in output

    def test_meta_hidden_unless_verbose(self) -> None:
        timed = _REACHABLE.model_copy(update={"meta": {"elapsed_ms": 0.042}})
        assert "elapsed_ms" not in render_result(timed)
        output = render_result(timed, verbose=True)
        assert "meta:" in output
        assert "elapsed_ms: 0.042" in output


class TestListings:
    def test_members_table(self) -> None:
        output = render_result(ServiceResult.success("members", count=2, items=["Jack", "Jill"]))
        assert "Member" in output
        assert "Jack" in output
        assert "Jill" in output
        assert output.endswith("2 members")

    def test_friends_names_the_member(self) -> None:
        output = render_result(
            ServiceResult.success("friends", member="Jack", count=1, items=["Jill"])
        )
        assert output.startswith("OK friends")
        assert "member: Jack" in output
        assert output.endswith("1 member")


def test_summary_lists_counts() -> None:
    output = render_result(ServiceResult.success("summary", members=7, friendships=6))
    assert "members: 7" in output
    assert "friendships: 6" in output


class TestErrors:
    def test_message(self) -> None:
        result = ServiceResult.failure(
            "distance", "UNKNOWN_MEMBER", "Not a member of the social network: 'Bob'"
        )
        assert render_result(result) == (
            "ERROR distance: Not a member of the social network: 'Bob'"
        )

    def test_detail_only_when_verbose(self) -> None:
        result = ServiceResult.failure("distance", "UNKNOWN_MEMBER", "Bad", missing=[99])
        assert "missing" not in render_result(result)
        assert "missing: [99]" in render_result(result, verbose=True)

    def test_without_error_object(self) -> None:
        assert "unknown error" in render_result(ServiceResult(ok=False, op="distance"))


class TestQuiet:
    def test_distance_is_bare_length(self) -> None:
        assert render_quiet(_REACHABLE) == "3"

    def test_items_one_per_line(self) -> None:
        result = ServiceResult.success("friends", member=2, count=3, items=[1, 4, 5])
        assert render_quiet(result) == "1\n4\n5"

    def test_other_data_as_pairs(self) -> None:
        result = ServiceResult.success("summary", members=7, friendships=6)
        assert render_quiet(result) == "members=7 friendships=6"

    def test_error(self) -> None:
        result = ServiceResult.failure("distance", "X", "boom")
        assert render_quiet(result) == "ERROR: distance: boom"
