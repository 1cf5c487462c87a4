"""Tests for the cluster builder."""

from tea_lens.scoring import Group, build_clusters, round_half_up

GROUPS = [
    Group("Calm", ("Meditation", "Yoga", "Reading")),
    Group("Active", ("Exercise", "Walking")),
    Group("Empty", ("Nothing",)),
]


def test_clusters_include_only_members_above_threshold():
    normalized = {"Meditation": 90, "Yoga": 81, "Reading": 40, "Exercise": 85, "Walking": 10}

    clusters = build_clusters(normalized, GROUPS, threshold=80, min_members=1)

    assert [cluster.label for cluster in clusters] == ["Calm", "Active"]
    assert [member.name for member in clusters[0].members] == ["Meditation", "Yoga"]


def test_cluster_score_is_rounded_member_mean():
    normalized = {"Meditation": 90, "Yoga": 81, "Exercise": 85}

    for cluster in build_clusters(normalized, GROUPS, threshold=80):
        scores = [member.score for member in cluster.members]
        assert cluster.score == round_half_up(sum(scores) / len(scores))


def test_min_members_filters_groups():
    normalized = {"Meditation": 90, "Yoga": 81, "Exercise": 85}

    clusters = build_clusters(normalized, GROUPS, threshold=80, min_members=2)

    assert [cluster.label for cluster in clusters] == ["Calm"]


def test_members_sorted_descending():
    normalized = {"Meditation": 82, "Yoga": 99, "Reading": 90}

    (cluster,) = build_clusters(normalized, GROUPS[:1], threshold=80)

    assert [member.score for member in cluster.members] == [99, 90, 82]
