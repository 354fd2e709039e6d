"""Portfolio content API: public content endpoints plus a small admin surface."""
