"""Hypothesis strategies for JSON trees."""

from hypothesis import strategies as st

# Keys never start with "@" so generated objects are never mistaken for
# adjacent type wrappers.
json_keys = st.text(max_size=12).filter(lambda k: not k.startswith("@"))

json_scalars = (
    st.none()
    | st.booleans()
    | st.integers(min_value=-(2**63), max_value=2**64)
    | st.floats(allow_nan=False, allow_infinity=False)
    | st.text(max_size=20)
)

json_trees = st.recursive(
    json_scalars,
    lambda children: st.lists(children, max_size=6)
    | st.dictionaries(json_keys, children, max_size=6),
    max_leaves=25,
)
