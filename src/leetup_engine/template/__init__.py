"""Solution file templates.

Generated solution files carry marker comments that delimit their
regions. Every region marker is emitted twice, bracketing its content:

    // @leetup=info id=1 lang=rust slug=two-sum
    // @leetup=custom
    ...problem statement...
    // @leetup=custom
    // @leetup=code
    // @leetup=inject:before_code
    use std::collections::HashMap;
    // @leetup=inject:before_code
    impl Solution { ... }
    // @leetup=code

Only the text inside the ``code`` region, minus its injected
sub-regions, is submitted. The marker grammar is persisted in user
files; changing it breaks previously generated files.
"""

MARKER_PREFIX = "@leetup="

# Region tags
TAG_INFO = "info"
TAG_CUSTOM = "custom"
TAG_BEFORE_CODE_EXCLUDE = "inject:before_code_ex"
TAG_CODE = "code"
TAG_BEFORE_CODE = "inject:before_code"
TAG_AFTER_CODE = "inject:after_code"

REGION_TAGS = (
    TAG_CUSTOM,
    TAG_BEFORE_CODE_EXCLUDE,
    TAG_CODE,
    TAG_BEFORE_CODE,
    TAG_AFTER_CODE,
)

# Placeholders
FUNC_PLACEHOLDER = "$func"
WORKING_DIR_PLACEHOLDER = MARKER_PREFIX + "working_dir"
PROBLEM_PLACEHOLDER = MARKER_PREFIX + "problem"
HOOK_PLACEHOLDERS = (WORKING_DIR_PLACEHOLDER, PROBLEM_PLACEHOLDER)
