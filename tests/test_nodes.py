from algo.nodes import ListNode, TreeNode, linked_list_to_list


def test_add_next_matches_manual_link():
    built = ListNode(1)
    built.add_next(2)

    manual = ListNode(1)
    manual.next = ListNode(2)

    assert built == manual


def test_add_next_appends_at_end():
    head = ListNode(1)
    for v in [2, 3, 4]:
        head.add_next(v)
    assert linked_list_to_list(head) == [1, 2, 3, 4]


def test_linked_list_to_list():
    t1 = ListNode(1)

    t2 = ListNode(1)
    t2.next = ListNode(2)

    t3 = ListNode(1)
    t3.next = ListNode(2)
    t3.next.next = ListNode(3)

    assert linked_list_to_list(t1) == [1]
    assert linked_list_to_list(t2) == [1, 2]
    assert linked_list_to_list(t3) == [1, 2, 3]


def test_linked_list_to_list_of_none_is_empty():
    assert linked_list_to_list(None) == []


def test_tree_node_defaults():
    node = TreeNode()
    assert (node.value, node.left, node.right) == (0, None, None)


def test_tree_node_children():
    root = TreeNode(1, left=TreeNode(2), right=TreeNode(3))
    assert root.left.value == 2
    assert root.right.value == 3