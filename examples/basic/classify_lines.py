"""Thread the classifier state by hand, one line at a time."""

from pepino import classify, expecting

state = None
for line in ["Examples:", "| id | name |", "| 1 | Alice |", "| 2 | Bob | extra |"]:
    result = classify(state, line)
    if result is None:
        print(f"rejected {line!r}: {expecting(state)}")
        break
    print(result)
    state = result
