# tests/generated_datasets/dataset_generator_categorical.py
import random

# Standard label column name for generated datasets
LABEL_COLUMN = 'label'

PLAY_TENNIS_HEADER = ['Outlook', 'Temperature', 'Humidity', 'Wind', 'PlayTennis']
PLAY_TENNIS_ROWS = [
    ['Sunny', 'Hot', 'High', 'Weak', 'No'],
    ['Sunny', 'Hot', 'High', 'Strong', 'No'],
    ['Overcast', 'Hot', 'High', 'Weak', 'Yes'],
    ['Rain', 'Mild', 'High', 'Weak', 'Yes'],
    ['Rain', 'Cool', 'Normal', 'Weak', 'Yes'],
    ['Rain', 'Cool', 'Normal', 'Strong', 'No'],
    ['Overcast', 'Cool', 'Normal', 'Strong', 'Yes'],
    ['Sunny', 'Mild', 'High', 'Weak', 'No'],
    ['Sunny', 'Cool', 'Normal', 'Weak', 'Yes'],
    ['Rain', 'Mild', 'Normal', 'Weak', 'Yes'],
    ['Sunny', 'Mild', 'Normal', 'Strong', 'Yes'],
    ['Overcast', 'Mild', 'High', 'Strong', 'Yes'],
    ['Overcast', 'Hot', 'Normal', 'Weak', 'Yes'],
    ['Rain', 'Mild', 'High', 'Strong', 'No'],
]


def play_tennis_table():
    """Quinlan's 14-day PlayTennis table, header first."""
    return [list(PLAY_TENNIS_HEADER)] + [list(row) for row in PLAY_TENNIS_ROWS]


def generate_rule_based_data(
    num_samples=200,
    attribute_values=None,  # e.g., {'color': ['red', 'green'], 'size': ['S', 'M', 'L']}
    label_rule=None,        # callable(record_dict) -> label
    label_noise=0.0,        # Probability of replacing the rule's label by a random one
    label_column=LABEL_COLUMN,
    seed=None
):
    """
    Generates a table whose label is a deterministic function of the attributes.
    Attribute values are drawn uniformly and independently.
    """
    if attribute_values is None:
        attribute_values = {
            'color': ['red', 'green', 'blue'],
            'size': ['S', 'M', 'L'],
            'shape': ['round', 'square'],
        }
    if label_rule is None:
        label_rule = lambda r: 'yes' if r['color'] == 'red' or (r['color'] == 'blue' and r['size'] == 'L') else 'no'

    if not attribute_values:
        raise ValueError("attribute_values cannot be empty.")

    rng = random.Random(seed)
    attribute_names = list(attribute_values.keys())
    header = attribute_names + [label_column]
    table = [header]

    for _ in range(num_samples):
        record = {name: rng.choice(attribute_values[name]) for name in attribute_names}
        table.append([record[name] for name in attribute_names] + [label_rule(record)])

    # Noise draws from every label the rule produced
    if label_noise > 0:
        possible_labels = sorted({row[-1] for row in table[1:]})
        for row in table[1:]:
            if rng.random() < label_noise:
                row[-1] = rng.choice(possible_labels)

    return table


def generate_independent_label_data(
    num_samples=200,
    attribute_values=None,
    labels=('A', 'B'),
    label_column=LABEL_COLUMN,
    seed=None
):
    """
    Generates a table whose labels are drawn independently of the attributes.
    """
    rng = random.Random(None if seed is None else seed + 1)
    return generate_rule_based_data(
        num_samples=num_samples,
        attribute_values=attribute_values,
        label_rule=lambda r: rng.choice(labels),
        label_column=label_column,
        seed=seed
    )


def table_to_records(table):
    """Converts a table (header first) into attribute dicts and their labels."""
    header = table[0]
    records, labels = [], []
    for row in table[1:]:
        records.append(dict(zip(header[:-1], row[:-1])))
        labels.append(row[-1])
    return records, labels
