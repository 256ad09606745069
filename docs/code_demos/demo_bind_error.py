"""SQL Builder script to demonstrate a bind error."""
import sqlbuilder as sb

bulk_builder = sb.BulkBuilder("INSERT INTO igneous_rocks (name, grain_size) VALUES (?)")

# Raises SQLBuilderBindError as rows must have two values
bulk_builder.bind("basalt")
