"""Jobly: users, job postings and applications over a relational store."""
