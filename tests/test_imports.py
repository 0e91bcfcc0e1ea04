def test_imports_smoke():
    import pandas as pd

    from bsense_core import api

    # sanity
    assert pd.DataFrame({"a": [1]}).shape == (1, 1)
    assert api.categorize("Starbucks Coffee", "") == "Dining"
    assert api.generate_report([]).totals.transaction_count == 0
