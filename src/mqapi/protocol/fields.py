"""Protocol constants.

Keep these in one place to avoid stringly-typed message handling.
"""

# Request envelope
CMD = "cmd"
ARGS = "args"
VARGS = "vargs"

# Response envelope
NID = "nid"
HDRS = "hdrs"
CODE = "code"
DATA = "data"

# Control commands are requests whose cmd starts with the sentinel.
CONTROL = ":"
TERMINATE = "terminate"
