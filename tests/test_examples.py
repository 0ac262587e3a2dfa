import pathlib

from spannergen import render_file

EXAMPLES = pathlib.Path(__file__).parent.parent / "examples" / "spanner"


def render_example() -> str:
    return render_file(EXAMPLES / "schema.graphql", EXAMPLES / "model.go.j2")


def test_spanner_example_models():
    rendered = render_example()

    assert rendered.startswith("// Code generated by spannergen. DO NOT EDIT.\n")
    assert "type Order struct {\n" in rendered
    assert '\tOrderId string `json:"orderId"`\n' in rendered
    assert '\tCustomer *Customer `json:"customer"`\n' in rendered
    assert '\tItems []Item `json:"items"`\n' in rendered
    assert '\tStatus *Status `json:"status"`\n' in rendered
    assert '\tCreatedAt time.Time `json:"createdAt"`\n' in rendered


def test_spanner_example_rows():
    rendered = render_example()

    assert "type OrderRow struct {\n" in rendered
    assert '\tOrderId string `spanner:"orderId"`\n' in rendered
    assert '\tBuyerId string `spanner:"buyerId"`\n' in rendered
    assert '\tItemIds []string `spanner:"itemIds"`\n' in rendered
    assert '\tStatus spanner.NullString `spanner:"status"`\n' in rendered
    assert '\tQuantity spanner.NullInt64 `spanner:"quantity"`\n' in rendered
    assert '\tPaid bool `spanner:"paid"`\n' in rendered
    assert '\tCreatedAt time.Time `spanner:"createdAt"`\n' in rendered
    assert '\tPrice spanner.NullFloat64 `spanner:"price"`\n' in rendered
    assert '\tEmail spanner.NullString `spanner:"email"`\n' in rendered


def test_spanner_example_keys():
    rendered = render_example()

    assert "// Order is stored in the Orders table.\n" in rendered
    assert "return spanner.Key{r.OrderId}" in rendered
    assert "return spanner.Key{r.Sku}" in rendered
    assert "return spanner.Key{r.Id}" in rendered


def test_spanner_example_is_deterministic():
    assert render_example() == render_example()
