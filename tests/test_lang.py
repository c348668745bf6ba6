"""Tests for language definitions and anchor rules."""

import pytest

from leetup_engine.errors import UnsupportedLanguage
from leetup_engine.lang import LANGUAGES, get_language, normalize_lang

RUST_TREE = """\
// Definition for a binary tree node.
// pub struct TreeNode {
//   pub val: i32,
// }
//
// impl TreeNode {
//   #[inline]
//   pub fn new(val: i32) -> Self {
//     TreeNode { val }
//   }
// }
use std::rc::Rc;
impl Solution {
    pub fn max_depth(root: Option<Rc<RefCell<TreeNode>>>) -> i32 {
        
    }
}"""

JAVA = """\
class Solution {
    public int[] twoSum(int[] nums, int target) {
        
    }
}"""

CPP = """\
/**
 * struct ListNode {
 *     ListNode(int x) : val(x), next(NULL) {}
 * };
 */
class Solution {
public:
    vector<int> twoSum(vector<int>& nums, int target) {
        
    }
};"""

PYTHON = """\
class Solution:
    def twoSum(self, nums: List[int], target: int) -> List[int]:
        """

JAVASCRIPT = """\
/**
 * @param {number[]} nums
 * @return {number[]}
 */
var twoSum = function(nums, target) {
    
};"""

GOLANG = "func twoSum(nums []int, target int) []int {\n    \n}"


class TestLookup:
    @pytest.mark.parametrize("key,name", [
        ("rust", "rust"),
        ("Rust", "rust"),
        ("python", "python3"),
        ("js", "javascript"),
        ("go", "golang"),
        ("c++", "cpp"),
    ])
    def test_aliases(self, key, name):
        assert get_language(key).name == name

    def test_unknown_language(self):
        with pytest.raises(UnsupportedLanguage, match="cobol"):
            get_language("cobol")

    def test_unknown_key_passes_through_normalize(self):
        assert normalize_lang("Kotlin") == "kotlin"

    def test_comment_prefixes(self):
        assert LANGUAGES["rust"].comment == "//"
        assert LANGUAGES["python3"].comment == "#"
        assert LANGUAGES["mysql"].comment == "--"

    def test_extensions(self):
        assert get_language("python").extension == "py"
        assert get_language("rust").extension == "rs"


class TestAnchors:
    @pytest.mark.parametrize("lang,code,anchor,name", [
        ("rust", RUST_TREE, 12, "max_depth"),
        ("java", JAVA, 0, "twoSum"),
        ("cpp", CPP, 5, "twoSum"),
        ("python3", PYTHON, 0, "twoSum"),
        ("javascript", JAVASCRIPT, 4, "twoSum"),
        ("golang", GOLANG, 0, "twoSum"),
    ])
    def test_anchor_and_name(self, lang, code, anchor, name):
        anchors = LANGUAGES[lang].anchors
        assert anchors.find_definition_anchor(code) == anchor
        assert anchors.extract_primary_name(code) == name

    def test_no_anchor(self):
        anchors = LANGUAGES["rust"].anchors
        assert anchors.find_definition_anchor("pub fn free() {}") is None

    def test_mysql_has_no_anchors(self):
        anchors = LANGUAGES["mysql"].anchors
        assert anchors.find_definition_anchor("SELECT 1;") is None
        assert anchors.extract_primary_name("SELECT 1;") is None
