"""Tests for StageResult."""

from wikilink.api.StageResult import StageResult


def test_stage_result_defaults_filled_by_callback():
    def do_work(result_obj):
        yield (1.0, "Complete")
        result_obj.result = "done"
        result_obj.output = {"ok": True}
        result_obj.success = True

    result = StageResult(announce="Working...", progress_callback=do_work)
    assert (result.result, result.output, result.success) == ("", {}, False)
    assert list(result.progress_callback(result)) == [(1.0, "Complete")]
    assert (result.result, result.output, result.success) == ("done", {"ok": True}, True)


def test_stage_result_outputs_are_not_shared():
    a = StageResult(announce="a", progress_callback=lambda r: iter(()))
    b = StageResult(announce="b", progress_callback=lambda r: iter(()))
    a.output["x"] = 1
    assert b.output == {}
