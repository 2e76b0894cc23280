"""Forum backend: pages, categories, subcategories, threads, posts and users."""
