# id3_tree/stopping.py
from .utils import is_homogeneous


def check_pre_split_stopping_conditions(node_labels, num_attributes):
    """
    Checks for basic stopping conditions before attempting to find a split.
    This avoids the cost of computing gains for nodes that are already terminal.

    Args:
        node_labels (list of str): Labels of the rows in the current node (non-empty).
        num_attributes (int): Number of attribute columns left (label excluded).

    Returns:
        str or None: A string describing the reason for stopping, or None if no stopping condition is met.
    """
    if is_homogeneous(node_labels):
        return "pure_node"

    if num_attributes <= 0:
        return "no_attributes_left"

    return None


def check_post_split_stopping_condition(best_attribute_index, best_gain, min_gain):
    """
    Determines if splitting should stop once the gains of all attributes are known.

    Args:
        best_attribute_index (int or None): Column of the most informative attribute.
        best_gain (float): Its information gain.
        min_gain (float): A split is only made when best_gain is strictly greater than this.

    Returns:
        str or None: A string describing the reason for stopping, or None if splitting should proceed.
    """
    if best_attribute_index is None:
        return "no_attributes_left"

    if not best_gain > min_gain:
        return "no_informative_attribute"

    return None
