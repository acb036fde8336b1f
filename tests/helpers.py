from engine import QuicksortAnimator


def drain(animator: QuicksortAnimator, limit: int = 100_000):
    """Tick until the animator reports completion; return every TickResult."""
    results = []
    for _ in range(limit):
        result = animator.tick()
        results.append(result)
        if result.is_final:
            return results
    raise AssertionError("animator did not finish")
