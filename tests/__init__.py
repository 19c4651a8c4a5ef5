"""radix64 test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : Shared behavior/invariants enforced across implementations
                  of `radix64.interfaces`.
- integration/  : Components used together (codec + token generator).

General guidance
- Keep unit tests fast and deterministic.
- Contract tests parametrize implementations through fixtures.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
