# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

# Version of the JSON document shape emitted for the source section.
# 16.1.1 - added "authors" to the source object.
JSON_SCHEMA_VERSION = "16.1.1"
