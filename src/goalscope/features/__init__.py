"""
Cleaning and derived columns for goalscope.

- `cleaning` parses dates, derives year/goal_for, filters minutes, encodes
  the own-goal and penalty flags and drops incomplete rows.
"""
