from luckybox.components.acquired_totals import AcquiredTotals
from luckybox.components.board_event import BoardEvent, EventKind
from luckybox.components.game_rules import GameRules
from luckybox.systems.board_ops import apply_rewards, fold_residual

RULES = GameRules.default()


def test_lucky_strike_and_pair_add_four_draws():
    counts = {}
    events = [
        BoardEvent(EventKind.LUCKY_STRIKE, {1: 3}),
        BoardEvent(EventKind.ONE_PAIR, {2: 2}),
    ]
    assert apply_rewards(events, counts, 0, RULES) == 4
    assert counts == {1: 3, 2: 2}


def test_point_table():
    expected = {
        EventKind.LUCKY_COLOR: 1,
        EventKind.ONE_PAIR: 1,
        EventKind.LUCKY_STRIKE: 3,
        EventKind.ALL_DIFFERENT: 5,
        EventKind.CLEAR: 5,
    }
    for kind, points in expected.items():
        assert apply_rewards([BoardEvent(kind)], {}, 10, RULES) == 10 + points


def test_order_does_not_change_totals():
    events = [
        BoardEvent(EventKind.LUCKY_COLOR, {4: 0}),
        BoardEvent(EventKind.ONE_PAIR, {4: 2}),
        BoardEvent(EventKind.ALL_DIFFERENT, {1: 1, 4: 1}),
        BoardEvent(EventKind.CLEAR, {}),
    ]
    forward, backward = {}, {}
    assert apply_rewards(events, forward, 2, RULES) == apply_rewards(list(reversed(events)), backward, 2, RULES)
    assert forward == backward == {1: 1, 4: 3}


def test_rewards_accumulate_into_acquired_totals():
    totals = AcquiredTotals.for_colors(range(1, 11))
    apply_rewards([BoardEvent(EventKind.ONE_PAIR, {6: 2})], totals.counts, 0, RULES)
    apply_rewards([BoardEvent(EventKind.LUCKY_STRIKE, {6: 3})], totals.counts, 0, RULES)
    assert totals.counts[6] == 5
    assert totals.total() == 5


def test_fold_residual_counts_each_remaining_toy():
    counts = {1: 2}
    folded = fold_residual([1, 0, 3, 3, 0, 0, 0, 0, 0], counts)
    assert folded == {1: 1, 3: 2}
    assert counts == {1: 3, 3: 2}

