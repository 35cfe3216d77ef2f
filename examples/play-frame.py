import pyarrow as pa

from framepyground import DataFrame

shops = DataFrame.from_arrow(
    pa.table(
        {
            "city": ["New York", "New York", "Los Angeles", "Los Angeles", "New York"],
            "shop": ["Shop A", "Shop B", "Shop C", "Shop D", "Shop E"],
            "n_employees": [10, 15, 8, 12, 20],
        }
    ),
    index=["A", "B", "C", "D", "E"],
)

revenue = DataFrame([[120.5, 80.0, 310.25]], index=["E", "A", "C"], columns=["revenue"])

print(shops.reindex(["C", "A"]).to_arrow())
print(shops.gets(["n_employees"]).groupby(shops.get("city")).sum().to_arrow())
print(shops.join_inner(revenue).to_arrow())
print(shops.describe().to_arrow())
