"""Columnar dataframe stored in fixed-size byte chunks, with CSV loading and group-by aggregation."""