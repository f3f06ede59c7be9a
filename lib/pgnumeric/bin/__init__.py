"""
Console-script collection package.

Contents:

	pg_numeric
		Encode decimal text into NUMERIC binary records and decode them back.
"""
