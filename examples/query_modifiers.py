"""Query modifiers — editing the query of a composite reference.

Demonstrates:
- Splitting ``path?query#fragment`` into a Reference
- Merging, sorting, removing and filtering query pairs
- Loading the query separator from a plain dict config
"""

from __future__ import annotations

from uri_components import ComponentConfig, FilterMode, Reference

if __name__ == "__main__":
    ref = Reference.from_string("/search?q=uri&page=2&debug#results")
    print(f"Query: {ref.get_query()}")

    print(f"merge_query:        {ref.merge_query('page=3&lang=en')}")
    print(f"sort_query_keys:    {ref.sort_query_keys()}")
    print(f"without_query_keys: {ref.without_query_keys('debug')}")
    print(f"filter_query:       {ref.filter_query(lambda value: value is not None)}")
    print(f"filter by key:      {ref.filter_query(lambda key: key != 'page', FilterMode.KEY)}")

    config = ComponentConfig.from_dict({"query_separator": ";"})
    legacy = Reference.from_string("/cgi-bin/run?a=1;b=2", config=config)
    print(f"Legacy separator:   {legacy.merge_query('b=3;c=4')}")
