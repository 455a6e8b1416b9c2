"""Square integer matrix multiplication by Strassen's algorithm, serial and threaded."""