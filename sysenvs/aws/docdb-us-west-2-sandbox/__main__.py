# This file is boilerplate. Copy it to any Pulumi project that needs an orderable DocDB instance class.
# The filters are read from the `docdb` namespace of the stack configuration, for example:
#
#   config:
#     aws:region: us-west-2
#     docdb:preferred_instance_classes: '["db.r6g.large", "db.r5.large"]'
#     docdb:default_only: "true"
#
# The selected instance class is exported under the `docdb` key.
from docdb_orderable.launcher import run_lookup

run_lookup()
