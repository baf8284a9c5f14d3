"""Tests for colour_mix.registry — variant discovery and first-match dispatch."""

import pytest
from colour_mix import registry
from colour_mix.core.types import GeneratorConfig, VariantContext, VariantRule


class TestDiscover:
    def test_finds_mix(self):
        assert 'mix' in registry.discover()

    def test_values_are_rules(self):
        for name, rule in registry.all_variants().items():
            assert isinstance(rule, VariantRule)
            assert rule.name == name

    def test_get(self):
        assert registry.get('mix').name == 'mix'

    def test_get_unknown(self):
        with pytest.raises(KeyError, match='Available: mix'):
            registry.get('nope')


class TestMatchFirst:
    def test_match(self):
        found = registry.match_first('mix-tint-10-text-red', VariantContext())
        assert found is not None
        rule, result = found
        assert rule.name == 'mix'
        assert result.matcher == 'text-red'

    def test_no_match(self):
        assert registry.match_first('text-red-500', VariantContext()) is None

    def test_uses_context_separators(self):
        ctx = VariantContext(config=GeneratorConfig(separators=('_',)))
        assert registry.match_first('mix-tint-10-text', ctx) is None
        assert registry.match_first('mix-tint-10_text', ctx) is not None


class TestRegister:
    @pytest.fixture(autouse=True)
    def private_registry(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(registry, '_registry', dict(registry.discover()))

    def _catch_all(self, name: str) -> VariantRule:
        rule = VariantRule(name=name)

        @rule.matcher
        def match(token, ctx):
            return 'caught'

        return rule

    def test_registered_rule_is_listed(self):
        rule = registry.register(self._catch_all('zz-custom'))
        assert registry.get('zz-custom') is rule
        assert 'mix' in registry.all_variants()

    def test_dispatch_is_by_name(self):
        registry.register(self._catch_all('aa-first'))
        rule, result = registry.match_first('mix-tint-10-x', VariantContext())
        assert rule.name == 'aa-first'
        assert result == 'caught'

    def test_name_clash_rejected(self):
        with pytest.raises(ValueError):
            registry.register(self._catch_all('mix'))

    def test_same_rule_twice_is_fine(self):
        rule = registry.get('mix')
        assert registry.register(rule) is rule
