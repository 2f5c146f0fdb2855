import pytest

from integration_loader.utils.label_selector import LabelSelector, Operator, Requirement, not_in

AUTO_RELEASE = "release.appstudio.openshift.io/auto-release"


@pytest.mark.parametrize(
    "labels,expected",
    [
        ({AUTO_RELEASE: "true"}, True),
        ({AUTO_RELEASE: "false"}, False),
        ({}, True),
        (None, True),
    ],
)
def test_not_in_treats_missing_label_as_match(labels, expected):
    selector = LabelSelector(requirements=(not_in(AUTO_RELEASE, "false"),))
    assert selector.matches(labels) is expected


def test_match_labels_all_required():
    selector = LabelSelector(match_labels={"a": "1", "b": "2"})
    assert selector.matches({"a": "1", "b": "2", "c": "3"})
    assert not selector.matches({"a": "1"})
    assert not selector.matches({"a": "1", "b": "3"})


def test_set_based_requirements():
    assert Requirement(key="env", operator=Operator.IN, values=("dev", "qa")).matches({"env": "qa"})
    assert not Requirement(key="env", operator=Operator.IN, values=("dev",)).matches({})
    assert Requirement(key="env", operator=Operator.EXISTS).matches({"env": ""})
    assert Requirement(key="env", operator=Operator.DOES_NOT_EXIST).matches({"other": "x"})


def test_render_query():
    selector = LabelSelector(
        match_labels={"appstudio.openshift.io/snapshot": "snapshot-sample"},
        requirements=(
            not_in("test.appstudio.openshift.io/optional", "true"),
            Requirement(key="tier", operator=Operator.EXISTS),
            Requirement(key="legacy", operator=Operator.DOES_NOT_EXIST),
        ),
    )
    assert str(selector) == (
        "appstudio.openshift.io/snapshot=snapshot-sample,"
        "test.appstudio.openshift.io/optional notin (true),tier,!legacy"
    )


def test_empty_selector_is_falsy_and_matches_everything():
    selector = LabelSelector()
    assert not selector
    assert selector.matches({"any": "label"})
