import pytest

from aprioriminer.AssociationRule import AssociationRule
from aprioriminer.FrequentItemsetData import FrequentItemsetData
from aprioriminer.Itemset import Itemset, MissingSupportCountError, SupportCountMap
from aprioriminer.RuleGenerator import (generate_all_basic_association_rules, mine_association_rules,
                                        move_one_item_to_consequents)


def rule(antecedent, consequent):
    return AssociationRule(list(antecedent), list(consequent))


def splits(rules):
    return set((''.join(rule.antecedent.sorted_items()), ''.join(rule.consequent.sorted_items())) for rule in rules)


def test_basket_rules(basket_data):
    rules = mine_association_rules(basket_data, 0.5)
    assert [(repr(r.antecedent), repr(r.consequent)) for r in rules] == [
        ('[b]', '[a]'), ('[b]', '[c]'), ('[c]', '[a]'), ('[c]', '[b]'), ('[a]', '[b]'), ('[a]', '[c]')]
    assert [r.confidence for r in rules] == pytest.approx([2 / 3] * 4 + [0.5] * 2)


def test_basket_rules_above_the_bar(basket_data):
    rules = mine_association_rules(basket_data, 0.6)
    assert splits(rules) == {('b', 'a'), ('b', 'c'), ('c', 'a'), ('c', 'b')}


def test_all_splits_at_zero_confidence(triple_data):
    rules = mine_association_rules(triple_data, 0.0)
    assert len(rules) == 12
    assert splits(rules) >= {('bc', 'a'), ('ac', 'b'), ('ab', 'c'), ('c', 'ab'), ('b', 'ac'), ('a', 'bc')}


def test_expanded_rules_are_filtered(triple_data):
    rules = mine_association_rules(triple_data, 0.7)
    assert splits(rules) == {('bc', 'a'), ('ac', 'b'), ('c', 'ab'),
                             ('b', 'a'), ('a', 'b'), ('c', 'a'), ('c', 'b')}


def test_full_confidence_keeps_perfect_implications(triple_data):
    rules = mine_association_rules(triple_data, 1.0)
    assert splits(rules) == {('bc', 'a'), ('ac', 'b'), ('c', 'ab'), ('b', 'a'), ('c', 'a'), ('c', 'b')}
    assert all(r.confidence == 1.0 for r in rules)


def test_rule_properties(triple_data):
    rules = mine_association_rules(triple_data, 0.0)
    frequent = set(triple_data.frequent_itemset_list)
    confidences = [r.confidence for r in rules]

    assert confidences == sorted(confidences, reverse=True)
    assert len(set(rules)) == len(rules)
    for r in rules:
        assert not r.antecedent & r.consequent
        assert r.itemset in frequent
        expected = triple_data.get_support(r.itemset) / triple_data.get_support(r.antecedent)
        assert r.confidence == pytest.approx(expected)


def test_single_itemsets_give_no_rules():
    counts = SupportCountMap({Itemset(['a']): 2})
    data = FrequentItemsetData([Itemset(['a'])], counts, 0.5, 2)
    assert mine_association_rules(data, 0.0) == []


def test_rules_below_confidence_are_not_expanded():
    # support counts chosen so that a -> bcd has confidence 1.0
    # but every rule it could be expanded from is below the bar
    counts = SupportCountMap()
    counts[Itemset('abcd')] = 2
    for itemset in ['abc', 'abd', 'acd', 'bcd', 'bc', 'bd', 'cd', 'a', 'b', 'c', 'd']:
        counts[Itemset(itemset)] = 2
    for itemset in ['ab', 'ac', 'ad']:
        counts[Itemset(itemset)] = 4
    data = FrequentItemsetData([Itemset('abcd')], counts, 0.0, 4)

    rules = mine_association_rules(data, 0.9)

    assert ('a', 'bcd') not in splits(rules)
    assert splits(rules) == {('bcd', 'a'), ('acd', 'b'), ('abd', 'c'), ('abc', 'd'),
                             ('bc', 'ad'), ('bd', 'ac'), ('cd', 'ab'),
                             ('b', 'acd'), ('c', 'abd'), ('d', 'abc')}


def test_missing_support_count_is_not_defaulted():
    counts = SupportCountMap({Itemset(['a', 'b']): 2, Itemset(['a']): 2})
    data = FrequentItemsetData([Itemset(['a', 'b'])], counts, 0.5, 2)
    with pytest.raises(MissingSupportCountError):
        mine_association_rules(data, 0.5)


@pytest.mark.parametrize('minimum_confidence', [float('nan'), -0.5, 1.01, 'high', None])
def test_invalid_confidence_rejected(basket_data, minimum_confidence):
    with pytest.raises(ValueError):
        mine_association_rules(basket_data, minimum_confidence)


def test_none_data_rejected():
    with pytest.raises(ValueError):
        mine_association_rules(None, 0.5)


def test_basic_rules(triple_data):
    rules = generate_all_basic_association_rules(Itemset('abc'), triple_data)
    assert rules == {rule('bc', 'a'), rule('ac', 'b'), rule('ab', 'c')}
    confidences = dict((r.consequent.sorted_items()[0], r.confidence) for r in rules)
    assert confidences == pytest.approx({'a': 1.0, 'b': 1.0, 'c': 2 / 3})


def test_move_one_item_merges_paths(triple_data):
    basic = {rule('bc', 'a'), rule('ac', 'b')}
    moved = move_one_item_to_consequents(Itemset('abc'), basic, triple_data)
    # c -> ab is reachable from both rules
    assert moved == {rule('c', 'ab'), rule('b', 'ac'), rule('a', 'bc')}
