# %% [markdown]
# # levkit quickstart
#
# Edit distance between two strings, the partial (rolling window) variant,
# and the scores derived from each.

# %%
import levkit as lk

a, b = "john wick", "john wicker"

# %% [markdown]
# ## Full distance
#
# Two insertions ('e', 'r') turn "john wick" into "john wicker".

# %%
print(lk.distance(a, b))
print(lk.normalized_distance(a, b))
print(lk.similarity(a, b))
print(lk.normalized_similarity(a, b))

# %% [markdown]
# ## Partial distance
#
# "john wick" occurs verbatim at the start of "john wicker", so the best
# window scores 0.

# %%
print(lk.partial_distance(a, b))
print(lk.normalized_partial_distance(a, b))
print(lk.partial_similarity(a, b))
print(lk.normalized_partial_similarity(a, b))

# %% [markdown]
# ## Batch and Polars

# %%
import polars as pl

titles = ["John Wick", "John Wick: Chapter 2", "Jane Doe", "Wicked"]
for m in lk.batch.best_matches(titles, "Wick", partial=True, limit=3):
    print(f"  [{m.score:.0%}] {m.text}")

df = pl.DataFrame({"title": titles})
print(
    df.with_columns(
        dist=pl.col("title").lev.distance("John Wick"),
        contains=pl.col("title").lev.is_within("Wick", max_distance=0, partial=True),
    )
)
