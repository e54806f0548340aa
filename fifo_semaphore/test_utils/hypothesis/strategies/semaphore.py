from hypothesis import strategies as st

# Strategy for semaphore capacities
capacity_strategy = st.integers(min_value=0, max_value=8)

# Strategy for invalid (negative) capacities
negative_capacity_strategy = st.integers(max_value=-1)

# Strategy for a single semaphore operation
operation_strategy = st.sampled_from(["acquire", "release"])

# Strategy for sequences of semaphore operations
operations_strategy = st.lists(operation_strategy, min_size=1, max_size=40)

# Strategy for a capacity together with a number of acquires it can satisfy
capacity_and_holds_strategy = capacity_strategy.flatmap(
    lambda capacity: st.tuples(
        st.just(capacity), st.integers(min_value=0, max_value=capacity)
    )
)

# Strategy for a positive capacity together with a number of extra acquires
capacity_and_waiters_strategy = st.tuples(
    st.integers(min_value=1, max_value=5), st.integers(min_value=1, max_value=10)
)
