# Copyright 2026 Fixturegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for sum-type member inference."""

import pytest

from fixturegen.generator.grouping import (
    assign_member,
    is_sum_type_name,
    matches_member,
    register_sum_type,
    resolve_sum_types,
)
from fixturegen.model import TypeModel

# ###############
# Naming Convention
# ###############


class TestIsSumTypeName:
    @pytest.mark.parametrize("name", ["isUserReference_Id", "isX", "is_"])
    def test_matches(self, name: str) -> None:
        assert is_sum_type_name(name)

    @pytest.mark.parametrize("name", ["is", "i", "", "IsUser_Id", "UserReference_Id"])
    def test_does_not_match(self, name: str) -> None:
        assert not is_sum_type_name(name)


class TestMatchesMember:
    def test_member_with_parent_prefix(self) -> None:
        assert matches_member("isUserReference_Id", "UserReference_EmailId")

    def test_parent_itself_is_not_a_member(self) -> None:
        assert not matches_member("isUserReference_Id", "UserReference")

    def test_requires_underscore_after_stem(self) -> None:
        assert not matches_member("isUserReference_Id", "UserReferenceEmail")

    def test_no_underscore_in_parent_never_matches(self) -> None:
        assert not matches_member("isUser", "User_Email")

    def test_nested_parent_uses_rightmost_separator_first(self) -> None:
        assert matches_member("isOuter_Inner_Choice", "Outer_Inner_Text")

    def test_nested_parent_falls_back_to_earlier_separator(self) -> None:
        assert matches_member("isOuter_Inner_Choice", "Outer_Other")

    def test_unrelated_record(self) -> None:
        assert not matches_member("isUserReference_Id", "Account_Id")

    def test_prefix_collision_is_accepted(self) -> None:
        # "User" is a prefix shared by both parents, so User_Phone matches isUser_Contact.
        assert matches_member("isUser_Contact", "User_Phone")


# ###############
# Model Updates
# ###############


class TestRegisterSumType:
    def test_registers_unset_entry(self) -> None:
        model = TypeModel()
        register_sum_type(model, "isA_B")
        assert model.sum_types == {"isA_B": None}

    def test_existing_entry_kept(self) -> None:
        model = TypeModel(sum_types={"isA_B": "A_X"})
        register_sum_type(model, "isA_B")
        assert model.sum_types["isA_B"] == "A_X"


class TestAssignMember:
    def test_assigns_matching_record(self) -> None:
        model = TypeModel()
        register_sum_type(model, "isUserReference_Id")
        assigned = assign_member(model, "UserReference_EmailId")
        assert assigned == ["isUserReference_Id"]
        assert model.sum_types["isUserReference_Id"] == "UserReference_EmailId"

    def test_first_match_wins(self) -> None:
        model = TypeModel()
        register_sum_type(model, "isUserReference_Id")
        assign_member(model, "UserReference_EmailId")
        assigned = assign_member(model, "UserReference_PhoneId")
        assert assigned == []
        assert model.sum_types["isUserReference_Id"] == "UserReference_EmailId"

    def test_non_matching_record_leaves_entry_unset(self) -> None:
        model = TypeModel()
        register_sum_type(model, "isUserReference_Id")
        assert assign_member(model, "Account") == []
        assert model.sum_types["isUserReference_Id"] is None

    def test_one_record_can_fill_several_sum_types(self) -> None:
        model = TypeModel()
        register_sum_type(model, "isUser_A")
        register_sum_type(model, "isUser_B")
        assert sorted(assign_member(model, "User_X")) == ["isUser_A", "isUser_B"]

    def test_resolve_sum_types_follows_traversal_order(self) -> None:
        model = TypeModel()
        register_sum_type(model, "isOrder_Payment")
        resolve_sum_types(model, ["Order", "Order_Card", "Order_Cash"])
        assert model.sum_types["isOrder_Payment"] == "Order_Card"
